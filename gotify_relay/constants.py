"""Constants for the gotify relay"""

# Error codes
RELAY_ERROR = 1000
DECODE_ERROR = 1001
RENDER_ERROR = 1002
DELIVERY_ERROR = 1003
STARTUP_CONFIG_ERROR = 1004

# Gotify defaults
DEFAULT_TITLE = "Prometheus Alert"
DEFAULT_PRIORITY = 5
GOTIFY_KEY_HEADER = "X-Gotify-Key"

# Server defaults
DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 9110
DEFAULT_LOG_LEVEL = "INFO"

# Time formatting
DISPLAY_TIMEZONE = "Asia/Shanghai"
DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Message layout
FIRING_STATUS = "firing"
FIRING_MARKER = "**[⚠️告警]**"
RESOLVED_MARKER = "**[✅恢复]**"
ALERT_NAME_LABEL = "告警名称"
START_TIME_LABEL = "开始时间"
END_TIME_LABEL = "结束时间"
INSTANCE_LABEL = "实例"
IP_LABEL = "IP"
DESCRIPTION_LABEL = "描述"

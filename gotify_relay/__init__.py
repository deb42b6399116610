"""Relay Prometheus Alertmanager webhooks to Gotify"""

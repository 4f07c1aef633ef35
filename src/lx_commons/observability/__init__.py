"""Observability – logging configuration for applications embedding lx-commons."""

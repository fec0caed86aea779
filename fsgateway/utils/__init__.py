"""Utility subpackages for fsgateway."""

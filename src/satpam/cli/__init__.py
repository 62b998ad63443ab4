"""Satpam command-line interface."""

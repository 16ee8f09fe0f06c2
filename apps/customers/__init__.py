"""Customers app package.

This app owns customer identity: registration, contact updates and the
uniqueness of email addresses. Customers cannot be deleted while any
booking or travel package still references them.
"""

"""Printable exports of generated boards."""

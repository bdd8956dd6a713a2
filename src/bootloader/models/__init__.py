"""Data models for bootloader."""

"""Prerequisite checks: macOS, Apple Silicon, Homebrew, Colima."""

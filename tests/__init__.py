"""Test suite for Helm Chart Updater.

This package contains test modules and fixtures for verifying the functionality
of the Helm Chart Updater tool. It includes tests for:
- Version comparison
- Manifest loading and saving
- Shell and helm command execution
- The chart update pipeline
- Git operations and pull request management
- Configuration handling and the CLI

The test suite uses pytest and provides fixtures for common test scenarios.
"""

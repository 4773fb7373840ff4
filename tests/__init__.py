"""Test package for session_timer.

Unit tests for the clocks, sessions, duration formatter and demonstration
scenarios. Run ``pytest`` from the project root.
"""

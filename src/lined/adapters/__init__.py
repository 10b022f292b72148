"""Hosts that feed input lines to a ModeManager."""

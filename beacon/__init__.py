"""Presentation-state layer for the beacon concert tracker."""

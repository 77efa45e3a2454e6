"""Heuristic UNO player with card tracking and opponent modeling."""

"""Plancraft: structured plans for personal goals and picnics."""

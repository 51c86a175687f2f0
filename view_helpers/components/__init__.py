"""Presentation helpers that turn values into display text and markup fragments."""

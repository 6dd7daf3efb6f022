"""Notifications — resolves the recipients of an order event and pushes to them."""

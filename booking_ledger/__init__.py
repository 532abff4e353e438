"""Booking ledger - financial figures and double-entry journals for tourism bookings."""

__version__ = "0.1.0"

"""Test helpers for the governance projection tests.

Helpers:
    chain_events: Builders for decoded chain events and sample addresses

Usage:
    from tests.helpers.chain_events import ALICE, transfer
"""

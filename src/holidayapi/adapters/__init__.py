"""Adapters: everything that touches HTTP (client factory, dispatcher, builders)."""

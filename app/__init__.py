"""LuxeLiving listings API."""

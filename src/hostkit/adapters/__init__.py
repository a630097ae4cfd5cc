"""
Adapters: asyncio task helpers and host filesystem lookups.
"""

"""Core domain package for phraseguard.

Core contains the phrase store, matching, command handling and routing without
any Telethon-specific code, keeping the moderation logic portable and testable.
"""

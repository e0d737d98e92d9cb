#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the LLM endpoint and the store are working.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from bridge.db.memory import get_store
from bridge.services.llm_client import get_llm_client
from bridge.core.config import get_settings


def main():
    settings = get_settings()
    print("=" * 50)
    print("BRIDGE - CONNECTION TEST")
    print("=" * 50)

    # Store
    print("\n[1] In-memory store...")
    for name, count in get_store().stats().items():
        print(f"    {name}: {count}")

    # LLM (only if API key is set)
    print("\n[2] Testing LLM API...")
    if settings.ai_configured:
        print(f"    Base URL: {settings.openai_base_url}")
        print(f"    Model: {settings.openai_model}")
        client = get_llm_client()
        if client.test_connection():
            print("    ✅ LLM: CONNECTED")
        else:
            print("    ❌ LLM: FAILED")
    else:
        print("    ⚠️  LLM: API key not configured (matching will use fallback results)")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()

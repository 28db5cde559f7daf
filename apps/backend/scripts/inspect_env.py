#!/usr/bin/env python3
"""
Environment and Provider Diagnostics Script

This script prints the runtime configuration for the analysis backend.
Use this to verify that:
1. An LLM provider is selected and its credential is present
2. The AgentManager can be built from the current settings
3. The configured timeout and token limits are sensible

Usage:
    cd apps/backend
    python scripts/inspect_env.py
"""

import os
import sys

# Add package to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def main():
    print("=" * 60)
    print("ATS Analyzer Provider Diagnostics")
    print("=" * 60)

    from ats_analyzer.core.config import settings

    print("\n📋 ENVIRONMENT VARIABLES (from .env)")
    print("-" * 40)

    print("\n🤖 LLM Configuration:")
    print(f"  LLM_PROVIDER:        {settings.LLM_PROVIDER}")
    print(f"  LL_MODEL:            {settings.LL_MODEL}")
    print(f"  LLM_MAX_TOKENS:      {settings.LLM_MAX_TOKENS}")
    print(f"  LLM_TEMPERATURE:     {settings.LLM_TEMPERATURE}")
    print(f"  LLM_TIMEOUT_SECONDS: {settings.LLM_TIMEOUT_SECONDS}")
    print(f"  LLM_BASE_URL:        {settings.LLM_BASE_URL or '(not set)'}")
    print(f"  LLM_API_KEY:         {'✅ Set' if settings.LLM_API_KEY else '❌ NOT SET'}")

    print("\n✅ VALIDATION CHECKS")
    print("-" * 40)

    errors = []
    warnings = []

    if settings.LLM_PROVIDER == "demo":
        print("⚠️  LLM Provider: demo (every analysis returns the canned result)")
        warnings.append("LLM_PROVIDER=demo never calls a real model")
    elif settings.LLM_PROVIDER == "ollama":
        print("ℹ️  LLM Provider: ollama (no API key required)")
    elif not settings.LLM_API_KEY:
        print(f"❌ LLM Provider: {settings.LLM_PROVIDER} needs LLM_API_KEY")
        errors.append("LLM_API_KEY (or GEMINI_API_KEY) must be set")
    else:
        print(f"✅ LLM Provider: {settings.LLM_PROVIDER}")

    if settings.LLM_MAX_TOKENS < 1000:
        print(f"⚠️  LLM_MAX_TOKENS: {settings.LLM_MAX_TOKENS} (may truncate the JSON reply)")
        warnings.append(f"LLM_MAX_TOKENS={settings.LLM_MAX_TOKENS} is low, recommend 4000")
    else:
        print(f"ℹ️  LLM_MAX_TOKENS: {settings.LLM_MAX_TOKENS}")

    print("\n🔧 RUNTIME INSTANTIATION TEST")
    print("-" * 40)

    try:
        from ats_analyzer.agent import AgentManager

        manager = AgentManager()
        print(f"✅ AgentManager built with provider: {manager.provider_name}")
    except Exception as e:
        print(f"❌ Failed to build AgentManager: {e}")
        errors.append(f"AgentManager instantiation failed: {e}")

    print("\n" + "=" * 60)
    if errors:
        print("❌ ERRORS FOUND:")
        for err in errors:
            print(f"   • {err}")
        print("\nFix these issues before running an analysis.")
        sys.exit(1)
    elif warnings:
        print("⚠️  WARNINGS (non-critical):")
        for warn in warnings:
            print(f"   • {warn}")
        print("\n✅ System should work, but consider addressing warnings.")
        sys.exit(0)
    else:
        print("✅ ALL CHECKS PASSED")
        sys.exit(0)


if __name__ == "__main__":
    main()

"""
Bridge - International Job Placement Service
A FastAPI backend for AI-assisted job matching across countries.

Architecture:
- In-memory store: profiles, jobs, matches, service orders
- OpenAI-compatible LLM: match analysis, chat assistant, document drafts
- Static pricing catalog for paid support tiers
"""

__version__ = "1.0.0"

"""
HTTP service for LLM-based vehicle assessment.
"""

"""LLM prompt templates, one module per area.

Templates use ``str.format`` placeholders listed above each constant;
flows render lists into text before formatting.
"""

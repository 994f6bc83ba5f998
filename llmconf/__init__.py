# -*- coding: utf-8 -*-
"""Credential and provider configuration for LLM command-line tools."""

__version__ = "0.1.0"

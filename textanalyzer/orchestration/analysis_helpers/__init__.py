# -*- coding: utf-8 -*-
"""
analysis_helpers package
========================

Small, focused helper modules used by PromptBuilder and ResponseCoercer.
Each file has a single responsibility:
- compose_texts: build the mode-specific system/user messages.
- json_parser: strip fences, locate and decode the JSON object in a reply.
- field_normalizer: validate/normalize score, enum and comment fields.
"""

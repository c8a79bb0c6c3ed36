"""Prompt construction package.

Contains the fixed task prompts consumed by `fitroom.image.service`.
"""

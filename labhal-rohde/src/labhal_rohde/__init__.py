"""Rohde & Schwarz instrument drivers for labhal.

Subpackages:
    lcx: LCX series LCR meters.
"""

"""
Discharge-AI: hospital discharge summary generator

Clinicians enter structured admission and clinical data through a tabbed
form; a language model drafts the narrative summary, which can be viewed,
printed, or exported as PDF and Word documents.
"""

__version__ = "0.1.0"
__author__ = "Discharge-AI Team"
__description__ = "Hospital discharge summary generator"

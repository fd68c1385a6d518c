#!/usr/bin/env python3
"""
Resume Import Module - Heuristic PDF/text to structured resume extraction.

Handles:
- Text acquisition from PDFs with OCR fallback
- Contact field extraction, section and item segmentation
- Assembly of the partial resume result and merging it into a live resume
"""
from extraction.resume.acquisition import TextAcquisition, configure_acquisition
from extraction.resume.assembler import assemble
from extraction.resume.exceptions import (
    DocumentReadError,
    EmptyTextError,
    ImportTimeoutError,
    RecoveryAction,
    ResumeImportException,
    recovery_for,
)
from extraction.resume.fields import extract_fields
from extraction.resume.items import segment_items
from extraction.resume.merge import merge_partial_resume
from extraction.resume.models import ExtractedItem, RawDocumentText, SectionBlock
from extraction.resume.normalizer import normalize
from extraction.resume.sections import segment
from extraction.resume.skills import extract_skills

__all__ = [
    'TextAcquisition',
    'configure_acquisition',
    'normalize',
    'extract_fields',
    'segment',
    'segment_items',
    'extract_skills',
    'assemble',
    'merge_partial_resume',
    'ExtractedItem',
    'RawDocumentText',
    'SectionBlock',
    'ResumeImportException',
    'DocumentReadError',
    'EmptyTextError',
    'ImportTimeoutError',
    'RecoveryAction',
    'recovery_for',
]

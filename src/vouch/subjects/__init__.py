"""Subjects: wrappers around a value under test."""

from .base import Subject
from .string import StringSubject
from .builder import CustomSubjectBuilder, SubjectBuilder

__all__ = [
    "CustomSubjectBuilder",
    "StringSubject",
    "Subject",
    "SubjectBuilder",
]

"""
Person Domain

Handles all person-related functionality including:
- Candidate intake, review status and documents
- Employee records (legacy simplified family) and documents
"""

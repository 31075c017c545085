"""
tailorkit - Rule-based chunking and relevance matching for job applications

Turns the extracted text of resumes and cover letters into typed, ordered
content chunks and ranks stored chunks against job postings so tailored
application material can be assembled from the most relevant pieces.

Architecture:
- Segmentation Context: Line classification, section detection and chunk construction
- Targeting Context: Relevance scoring of stored chunks and documents against job postings
"""

__version__ = "0.1.0"

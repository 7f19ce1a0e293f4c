"""
Retrieval-augmented generation service.

Ingests documents from S3 into an OpenSearch k-NN index and answers questions
with Bedrock models grounded on the retrieved chunks.
"""

__version__ = "0.1.0"

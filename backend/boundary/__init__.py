"""
Adapters for MemoryVault's external systems.

- aws: raw document storage in S3
- db: document metadata in PostgreSQL
- llm: Gemini chat and embedding clients
- vdb: owner-scoped vector index
"""

"""
DOMAIN LAYER - The Heart of the Messaging Service

This layer contains:
- Entities: Conversation, Message, Attachment, MessageEvent
- Value Objects: ids, channel/status/kind enums, filters and pagination
- Ports: Interfaces that infrastructure implements (store, cache, events, files)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Redis, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""

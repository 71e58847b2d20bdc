"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS)
- queries/   → Read operations (CQRS)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes) and ConversationAccess

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories, cache and event ports
"""

"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Record store implementations (Prisma, in-memory)
- cache/: Redis client factory and CacheService variants
- events/: EventPublisher variants (Redis PUBLISH, no-op)
- storage/: FileStorage variants (local disk, no-op)
- serialization.py: entity <-> JSON dict mapping shared by cache and events
"""

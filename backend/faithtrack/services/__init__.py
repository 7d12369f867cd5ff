# Services package init
"""
Faithtrack Backend: Services Layer
====================================

What:  Business logic between routes (HTTP) and the database (persistence).
How:   Stateless service classes with module-level singletons. Every method
       receives the request's AsyncSession and the caller id explicitly.

Service Inventory:
    - PrayerService:         private prayer list with answered toggle
    - PrayerWallService:     public wall of intentions and prayer counts
    - JournalService:        private journal entries
    - DevotionalService:     daily verse + reflection per calendar day
    - SearchHistoryService:  append-only AI question/answer log
    - GuidanceLLM (abstract) / GrokService: xAI chat-completion call + save
"""

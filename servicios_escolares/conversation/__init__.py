from servicios_escolares.conversation.engine import RULES, ConversationEngine, IntentRule, Query

__all__ = ["ConversationEngine", "IntentRule", "Query", "RULES"]

from app.engine.relationships import RelationshipMaintainer

__all__ = ["RelationshipMaintainer"]

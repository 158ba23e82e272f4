"""Application layer - Use cases and orchestration.

Structure:
- services/: Claims issuance, lifecycle tracking and the access gate
- commands/: Admin lifecycle command dataclasses and handlers

The application layer orchestrates domain logic (role catalog, hierarchy
resolver, access evaluator) but contains no authorization rules itself.
"""

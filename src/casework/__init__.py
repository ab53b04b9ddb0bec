"""
Casework Coach - Trauma-informed case management assistant.

Components:
- Engine: Rule-based next-best-action matching against playbooks
- Knowledge: Organizational knowledge base and reference documents
- Services: LLM-generated case plans, skill resources, client handouts
"""

__version__ = "1.0.0"

# Services package init
"""
FAQDesk Backend: Services Layer
=================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).

Service Inventory:
    - FaqService: validation and the five CRUD operations over `faq`
"""

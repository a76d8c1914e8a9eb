# Routes package init
"""
FAQDesk Backend: API Routes Package
=====================================

Route Inventory:
    - faq.py:     GET    /faq          (list entries, newest first)
                  GET    /faq/{id}     (single entry)
                  POST   /faq          (create from form fields)
                  PUT    /faq/{id}     (replace from form fields)
                  DELETE /faq/{id}     (remove entry)
    - health.py:  GET    /health       (store connectivity check)

Routes stay thin: they read path and form input, call FaqService and let
the global exception handlers in main.py format any error.
"""

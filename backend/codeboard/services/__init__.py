# Services package init
"""
CodeBoard Backend: Services Layer
==================================

Service Inventory:
    - LanguageService: request limits, declared-language precedence and
      rule-table listings on top of the classifier
"""

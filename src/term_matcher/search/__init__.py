"""
Term matching package.

This package decides whether an indexed token satisfies a search term:
- tokens: Token and TokenizedItem boundary types
- models: TermMatch value type
- matchers: TermMatcher base class and the equals/startsWith/contains matchers
- matcher_set: Priority-ordered matcher collections and the matcher registry
"""

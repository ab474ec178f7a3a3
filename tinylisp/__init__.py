"""
A reader and evaluator for a tiny parenthesized arithmetic language.
"""

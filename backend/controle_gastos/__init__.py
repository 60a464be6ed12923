"""
Controle de Gastos - personal income/expense tracker.
"""

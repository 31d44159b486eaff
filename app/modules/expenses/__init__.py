"""
Módulo de Gastos

Gastos de la sede (incluye créditos a empleados) y otros ingresos que no
provienen de ventas en caja.
"""

"""
Módulo de Catálogo

Servicios (barbería, nórdico, zona gamer) y productos (snacks, cortesías,
venta al detal) de cada sede. La categoría de cada ítem determina en qué
rubro de ingresos se contabiliza.
"""

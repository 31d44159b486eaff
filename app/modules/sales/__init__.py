"""
Módulo de Ventas

Tickets activos (servicio en curso) y transacciones completadas. Un ticket
se convierte en transacción al registrar el método de pago.
"""

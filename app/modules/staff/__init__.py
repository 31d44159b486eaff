"""
Módulo de Personal

Directorio de barberos, barbero principal, recepción y limpieza por sede.
El rol del barbero define cómo se calcula su comisión semanal.
"""

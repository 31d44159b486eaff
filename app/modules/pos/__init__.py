"""
Módulo POS: cierres de caja diarios y ajustes de la aplicación (tasa BCV)
"""

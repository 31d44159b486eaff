"""
Reports Module

Reportes de la cadena de barberías calculados sobre las tablas de los demás
módulos (no crea tablas propias).

Funcionalidades principales:
- Filtro de periodos (rango inclusivo o presets hoy/mes/año)
- Distribución de ganancias por sede y total de socios
- Comisiones semanales de barberos por niveles
- Resumen de caja, ingresos por categoría y ganancia por ítem
- Exportación CSV

Architecture Pattern: Service Layer
- routers/ -> Define FastAPI endpoints con validaciones
- services/ -> Calculadores puros y servicios de reportes
- schemas/ -> Modelos Pydantic para responses
- utils/ -> Periodos, exportación CSV y formateo
"""

"""
src/memspace/settings.py
Constantes del simulador. No hay ficheros ni variables de entorno:
el único parámetro de construcción es el tamaño del espacio gestionado.
"""

# Dirección devuelta por malloc cuando ningún bloque libre es suficiente
NULL_ADDRESS = -1

# Formato de depuración: "(0,10), (10,10)" y free/allocated en líneas distintas
BLOCK_SEPARATOR = ", "
LIST_SEPARATOR = "\n"

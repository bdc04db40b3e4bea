"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Tipos de resultado reusables en CUALQUIER dominio:
     - Ok, Err, Result (errores como valores, sin excepciones)
     - Combinable (errores que se acumulan por concatenación)
     - traverse_validated (validación acumulativa, estilo applicative)
   • Helpers genéricos SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Errores específicos del dominio (InvalidNumbers, NegativeIntegers)
   • Reglas de negocio (delimitadores, límite de 1000)

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/

💡 Principio preventivo:
   Si no podrías reusar este código en un parser de CSV O en un validador de
   formularios, probablemente NO pertenece a core/.
"""

from .result import Combinable, Err, Ok, Result, UnwrapError, traverse_validated

__all__ = [
    "Combinable",
    "Err",
    "Ok",
    "Result",
    "UnwrapError",
    "traverse_validated",
]

"""📦 modules/ — Bounded contexts específicos del negocio

✨ Estado actual:
   • calculator/ → Suma de cadenas delimitadas con validación por capas

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/        → Value objects, errores y reglas puras (sin I/O)
   • application/   → Casos de uso instrumentados
   • infrastructure/→ Logging y métricas
   • presentation/  → CLI
"""

"""
Errores del núcleo de puntuación.
Se propagan tal cual al llamador (prompt, lector bulk o API); el núcleo no reintenta ni registra.
"""


class StressCheckError(ValueError):
    """Base de los errores de la check de estrés."""
    code = "stress_check_error"


class IllegalQuestionError(StressCheckError):
    """Número de pregunta fuera de 1..57, o almacén ya lleno."""
    code = "illegal_question"


class IllegalAnswerError(StressCheckError):
    """Respuesta fuera de 1..4, o suma de sub-escala fuera de su tabla."""
    code = "illegal_answer"


class NotFulfilledError(StressCheckError):
    """Se pidió un puntaje con preguntas sin responder."""
    code = "not_fulfilled"

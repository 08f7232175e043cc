"""Energy expenditure domain.

Stima del metabolismo basale (BMR), del dispendio energetico giornaliero
(TDEE) e dei target calorici/macro derivati. Tutto puro e request-scoped.
"""

"""Domain layer per il calcolo del fabbisogno energetico.

Logica di business pura (BMR, TDEE, obiettivi calorici e macro),
disaccoppiata dal layer HTTP e dall'infrastruttura.
"""

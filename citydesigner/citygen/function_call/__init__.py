"""Function call package providing the high level city generation interface."""
from citydesigner.citygen.function_call.city_function_call import \
    CityFunctionCall

__all__ = ['CityFunctionCall']

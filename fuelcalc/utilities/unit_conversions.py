"""This module contains functions for unit conversions"""

def F_to_C(f_f: float) -> float:
    """Converts from Fahrenheit to Celsius

    Args:
        f_f (float): Fahrenheit

    Returns:
        float: Celsius
    """
    g = 5 / 9
    h = 32
    c = g * (f_f - h)

    return c

def C_to_F(f_c: float) -> float:
    """Converts from Celsius to Fahrenheit

    Args:
        f_c (float): Celsius

    Returns:
        float: Fahrenheit
    """
    g = 9 / 5
    h = 32
    f = f_c * g + h

    return f

def ch_h_to_ft_min(f_ch_h: float) -> float:
    """Converts from chains/hour to ft/min

    One chain is 66 feet and one hour is 60 minutes. No clamping is applied.

    Args:
        f_ch_h (float): chains/hour

    Returns:
        float: ft/min
    """
    f = f_ch_h * 66.0 / 60.0

    return f

def mph_to_ft_min(f_mph: float) -> float:
    """Converts from mph to ft/min

    Args:
        f_mph (float): mph

    Returns:
        float: ft/min
    """
    g = 88
    f = f_mph * g

    return f

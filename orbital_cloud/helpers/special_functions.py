import numpy as np

# grows monotonically; factorial(k) == _factorial_table[k] once computed
_factorial_table: list[int] = [1, 1]

def factorial(k: int) -> int:
    """
    Memoized factorial k!.

    Negative arguments return 1 so that expressions such as (n-l-1)! stay
    defined while callers probe invalid quantum numbers.
    """
    if k < 0:
        return 1
    if k < len(_factorial_table):
        return _factorial_table[k]

    result = _factorial_table[-1]
    for i in range(len(_factorial_table), k + 1):
        result *= i
        _factorial_table.append(result)
    return result

def double_factorial(k: int) -> int:
    """
    k!! for odd or even k, with (-1)!! = 0!! = 1.
    """
    result = 1
    for i in range(k, 0, -2):
        result *= i
    return result

def associated_laguerre(k: int, alpha: float, x):
    """
    Associated Laguerre polynomial L_k^α(x) by the three-term recurrence.

    L_0^α(x) = 1
    L_1^α(x) = 1 + α - x
    L_j^α(x) = ((2j - 1 + α - x) L_{j-1}^α(x) - (j - 1 + α) L_{j-2}^α(x)) / j

    Args:
        k: Degree of the polynomial (n - l - 1 for hydrogen-like orbitals)
        alpha: Upper index (2l + 1 for hydrogen-like orbitals)
        x: Argument, scalar or numpy array

    Returns:
        L_k^α(x) with the same shape as x
    """
    x = np.asarray(x, dtype=np.float64)
    l_prev2 = np.ones_like(x)
    if k == 0:
        return _as_output(l_prev2)

    l_prev1 = 1.0 + alpha - x
    for j in range(2, k + 1):
        l_curr = ((2 * j - 1 + alpha - x) * l_prev1 - (j - 1 + alpha) * l_prev2) / j
        l_prev2 = l_prev1
        l_prev1 = l_curr

    return _as_output(l_prev1)

def associated_legendre(l: int, m: int, x):
    """
    Associated Legendre function P_l^|m|(x) (Condon-Shortley phase included).

    P_m^m(x) = (-1)^m (2m-1)!! (1-x²)^(m/2)
    P_{m+1}^m(x) = x (2m+1) P_m^m(x)
    (l-m) P_l^m(x) = x (2l-1) P_{l-1}^m(x) - (l+m-1) P_{l-2}^m(x)

    Args:
        l: Degree
        m: Order, only |m| is used
        x: cos θ in [-1, 1], scalar or numpy array

    Returns:
        P_l^|m|(x), or 0 when |m| > l
    """
    x = np.asarray(x, dtype=np.float64)
    abs_m = abs(m)
    if abs_m > l:
        return _as_output(np.zeros_like(x))

    p_mm = np.ones_like(x)
    if abs_m > 0:
        sin_part = np.sqrt(np.clip(1.0 - x * x, 0.0, None))
        p_mm = (-1.0) ** abs_m * double_factorial(2 * abs_m - 1) * sin_part ** abs_m
    if l == abs_m:
        return _as_output(p_mm)

    p_mm1 = x * (2 * abs_m + 1) * p_mm
    for ll in range(abs_m + 2, l + 1):
        p_ll = (x * (2 * ll - 1) * p_mm1 - (ll + abs_m - 1) * p_mm) / (ll - abs_m)
        p_mm = p_mm1
        p_mm1 = p_ll

    return _as_output(p_mm1)

def _as_output(values: np.ndarray):
    # 0-d arrays come back as plain floats
    if values.ndim == 0:
        return float(values)
    return values

from dataclasses import dataclass
from typing import List, Tuple
import warnings
import numpy as np
from scipy.optimize import curve_fit


def format_float(value):
    return f"{value:.2f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class GrowthForm:
    """
    Represent a growth function f(n) = n^s * (log n)^t by its two
    exponents.  Both are >= 0.
    """

    s: float
    t: float

    def __str__(self) -> str:
        parts = []
        if self.s != 0:
            if self.s == 0.5:
                parts.append("sqrt(n)")
            elif self.s == 1:
                parts.append("n")
            else:
                parts.append(f"n**{format_float(self.s)}")
        if self.t != 0:
            if self.t == 1:
                parts.append("log(n)")
            else:
                parts.append(f"log(n)**{format_float(self.t)}")
        if parts == []:
            return "1"
        return "*".join(parts)

    def as_bigo(self) -> str:
        return f"O({self})"

    def is_constant(self) -> bool:
        return self.s == 0 and self.t == 0

    def evaluate(self, n) -> np.ndarray:
        n = np.asarray(n, dtype=np.float64)
        return n**self.s * log(n) ** self.t


def log(x):
    x = np.asarray(x)
    result = np.full_like(x, -np.inf, dtype=np.float64)  # Initialize with -inf
    np.log(x, where=(x > 0), out=result)
    return result


class Model:
    def __init__(self, form: GrowthForm):
        self.name = form.as_bigo()
        self.form = form
        if form.is_constant():
            self.func = lambda n, a: np.ones(np.shape(n)) * a
        else:
            self.func = lambda n, a, b: a * form.evaluate(n) + b
        self.param_count = self.func.__code__.co_argcount - 1  # Subtract 1 for 'n'

    def __str__(self):
        return self.name


class FittedModel:
    def __init__(
        self,
        model: Model,
        params: np.ndarray,
        n: np.ndarray,
        y: np.ndarray,
    ):
        self.model = model
        self.params = params
        self.n = n
        self.y = y

    def predict(self, n: np.ndarray | None = None):
        if n is None:
            n = self.n
        return self.model.func(n, *self.params)

    def residuals(self, n: np.ndarray | None = None, y: np.ndarray | None = None):
        if n is None:
            n = self.n
        if y is None:
            y = self.y
        return y - self.predict(n)

    def aic(self, n: np.ndarray | None = None, y: np.ndarray | None = None):
        k = len(self.params)  # Number of parameters
        residuals = self.residuals(n, y)
        rss = np.sum(residuals**2)  # Residual sum of squares
        if y is None:
            y = self.y
        n_points = len(y)  # Number of data points

        if n_points < 2 or rss < 0:
            return np.inf

        if rss == 0:
            return -np.inf

        return 2 * k + n_points * np.log(rss / n_points)

    def __str__(self):
        return self.model.name


# Model definitions
model_constant = Model(GrowthForm(0, 0))
model_log_n = Model(GrowthForm(0, 1))
model_sqrt_n = Model(GrowthForm(0.5, 0))
model_linear_n = Model(GrowthForm(1, 0))
model_n_log_n = Model(GrowthForm(1, 1))
model_n_squared = Model(GrowthForm(2, 0))
model_n_cubed = Model(GrowthForm(3, 0))

# Candidates for inference, slowest growing first
models = [
    model_constant,
    model_log_n,
    model_sqrt_n,
    model_linear_n,
    model_n_log_n,
    model_n_squared,
    model_n_cubed,
]


def fit_model(n, y, model) -> Tuple[FittedModel | None, List[str]]:
    try:
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            (params, _) = curve_fit(
                model.func,
                n,
                y,
                p0=[1.0] * model.param_count,
                maxfev=10000,
            )

            # If any relevant warning occurred, return None
            if w:
                reported = []
                for wm in w:
                    message = f"fit_model {model.name}: {wm.message}"
                    if message not in reported:
                        reported += [message]
                return None, reported

        return FittedModel(model=model, params=params, n=n, y=y), []
    except (RuntimeError, ValueError, TypeError) as e:
        return None, [f"fit_model {model.name}: {str(e)}"]


def fit_models(n, y) -> Tuple[List[FittedModel], List[str]]:
    """Fit models to data and order by increasing aic."""
    results = [fit_model(n, y, model) for model in models]
    fits = [f for f, _ in results if f is not None]
    warnings = [warning for _, warnings in results for warning in warnings]
    return sorted(fits, key=lambda x: x.aic()), warnings


@dataclass
class InferBoundResult:
    models: List[FittedModel]
    warnings: List[str]

    @property
    def best(self) -> FittedModel | None:
        return self.models[0] if self.models else None


def infer_bound(n: np.ndarray, y: np.ndarray) -> InferBoundResult:
    fits, warnings = fit_models(
        np.asarray(n, dtype=np.float64), np.asarray(y, dtype=np.float64)
    )
    return InferBoundResult(fits, warnings)

# engabra

Geometric algebra of three-dimensional Euclidean space (G3) for engineering
computation, in plain Python with no dependencies.

## Types

`engabra.types` provides the blades and their common combinations:

| Type          | Grades                          |
|---------------|---------------------------------|
| `Scalar`      | 0                               |
| `Vector`      | 1 (`e1`, `e2`, `e3`)            |
| `BiVector`    | 2 (`e23`, `e31`, `e12`)         |
| `TriVector`   | 3 (`e123`)                      |
| `Spinor`      | scalar + bivector               |
| `ImSpin`      | vector + trivector              |
| `ComPlex`     | scalar + trivector              |
| `DirPlex`     | vector + bivector               |
| `MultiVector` | all grades                      |

Blades are built from their components, e.g. `Vector(1.0, 2.0, 3.0)`.
Composite types are built from their blades, and accept plain numbers or
sequences in place of a blade: `Spinor(0.5, BiVector(0.0, 0.0, 1.0))` or
`Spinor(0.5, (0.0, 0.0, 1.0))`. All instances are immutable, can be iterated
and indexed component by component (a `MultiVector` in the order scalar,
e1, e2, e3, e23, e31, e12, e123), and print as fixed-point columns.

`null(kind)`, `zero(kind)` and `one(kind)` build special instances of a
type (`one` only for `float`, `Scalar`, `Spinor`, `ComPlex` and
`MultiVector`). A null instance holds NaN values and marks a result that
could not be computed; test it with `engabra.validity.is_valid`.
`to_multivector(item)` widens a number or any entity to a full
`MultiVector`. A `ComPlex` converts to and from Python's `complex` with
`complex(c)` and `ComPlex.from_complex(z)`. `is_blade(value)` tells blades
from composites.

The module also holds the basis entities `e1`, `e2`, `e3`, `e23`, `e31`,
`e12`, `e123`, the constants `pi`, `pi_half`, `pi_qtr`, `turn_full`,
`turn_half`, `turn_qtr`, and the low-level helpers
`binary_element_by_element`, `prod_comm` and `prod_anti`.

## Operations

Arithmetic is done with functions; the types do not overload `+`, `-`
or `*`.

- `engabra.addition.add(a, b)` — sums of like types, and of the pairings
  whose result is a `Spinor`, `ComPlex`, `ImSpin` or `MultiVector`
  (for example `Scalar` + `BiVector` gives a `Spinor`). Other pairings,
  such as `Scalar` + `Vector`, raise `TypeError`.
- `engabra.subtraction.subtract(a, b)` and `negate(item)` — the same
  pairings as addition, plus `Vector` − `BiVector` (a `DirPlex`).
- `engabra.scaling.scale(factor, item)` — a real factor times a number or
  any entity, keeping the entity's type.
- `engabra.product.multiply(a, b)` — the geometric product, for every
  pairing of the types above and plain numbers. The result has the
  narrowest type that holds every grade the product can produce: a
  `Vector` times a `Vector` gives a `Spinor`, a `Spinor` times a `ComPlex`
  gives a `MultiVector`.

## Functions

`engabra.functions` offers `sq`, `cube`, `mag_sq`, `magnitude`,
`pair_mag_dir`, `direction`, `amp_sq`, `amplitude`, `reverse`, `dirverse`,
`inverse` (for blades, `ComPlex` and `MultiVector`), `exp` (for
`BiVector`, `Spinor` and `MultiVector`), and, for spinors, `log_g2` and
`sqrt_g2`. Where no meaningful value exists (the direction of zero, the
inverse of zero, the logarithm of zero) the null instance of the result
type is returned.

```python
import math
from engabra.types import BiVector, Vector, Spinor
from engabra.scaling import scale
from engabra.product import multiply
from engabra.functions import direction, exp, log_g2, sqrt_g2, sq

# Euler identity: exp(pi * B) == -1 for a unit bivector B
angle = scale(math.pi, direction(BiVector(1.0, 0.0, 1.0)))
print(exp(angle))                      # close to -1 with zero bivector

# square root of the product of two vectors
ab = multiply(Vector(-0.8, 0.2, 0.7), Vector(1.2, 0.9, 1.3))
root = sqrt_g2(ab)
print(sq(root))                        # close to ab

# logarithm inverts exponential
print(exp(log_g2(Spinor(-2.0, BiVector(0.5, -0.3, 0.7)))))
```

## What it does not do

The package has no parser for reading entities back from text; printing
is one way only. There are no circular or hyperbolic functions, no general
roots or powers, and no logarithm outside the spinor (scalar + bivector)
case.

## Tests

```
pip install -e .[test]
pytest
```
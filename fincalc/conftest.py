import pytest


@pytest.fixture
def conventional_flows() -> list[float]:
  """One outflow followed by growing inflows; IRR is about 24.89%."""
  return [-1000.0, 300.0, 400.0, 500.0, 600.0]


@pytest.fixture
def project_flows() -> list[float]:
  """10,000 project; NPV at 10% is about 1838.67."""
  return [-10000.0, 3000.0, 4000.0, 5000.0, 3000.0]


@pytest.fixture
def all_outflows() -> list[float]:
  """No positive flow, so no rate of return exists."""
  return [-1000.0, -200.0, -50.0]

import logging
import math

import numpy as np
import pytest

from astrosky.config import KeplerConfig
from astrosky.core import NonConvergentError
from astrosky.core.astro_time import J2000_JD
from astrosky.universe.minor_bodies import (
    GM_SUN,
    KeplerianElements,
    from_keplerian,
    load_mpc_file,
    minor_body_magnitude,
    solve_kepler_elliptic,
    solve_kepler_hyperbolic,
)


@pytest.mark.parametrize("e", np.linspace(0.0, 0.9, 10))
@pytest.mark.parametrize("mean_anomaly", np.linspace(0.0, 2.0 * math.pi, 13))
def test_elliptic_solver_converges_quickly(e, mean_anomaly):
    sol = solve_kepler_elliptic(mean_anomaly, e)
    assert sol.converged
    assert sol.iterations < 50
    assert sol.anomaly - e * math.sin(sol.anomaly) == pytest.approx(mean_anomaly, abs=1e-8)


@pytest.mark.parametrize("e,mean_anomaly", [(1.5, 2.0), (1.1, -0.7), (3.0, 25.0), (1.2, 5000.0), (1.05, -2.0e4)])
def test_hyperbolic_solver(e, mean_anomaly):
    sol = solve_kepler_hyperbolic(mean_anomaly, e)
    assert sol.converged
    assert e * math.sinh(sol.anomaly) - sol.anomaly == pytest.approx(mean_anomaly, abs=1e-6)


def test_solver_reports_iteration_cap():
    sol = solve_kepler_elliptic(1.0, 0.5, tol=1e-12, max_iter=1)
    assert not sol.converged
    assert sol.iterations == 1


def circular_orbit(**overrides):
    values = dict(eccentricity=0.0, inclination=0.0, longitude_of_ascending_node=0.0,
                  argument_of_periapsis=0.0, semi_major_axis=1.0,
                  epoch=J2000_JD, mean_anomaly=0.0, name="test")
    values.update(overrides)
    return KeplerianElements(**values)


class TestFromKeplerian:

    def test_at_epoch_with_zero_mean_anomaly(self):
        pos = from_keplerian(circular_orbit(), J2000_JD)
        assert (pos.x, pos.y, pos.z) == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)
        assert pos.orbital_plane.r == pytest.approx(1.0)
        assert pos.solution.converged

    def test_quarter_period(self):
        period = 2.0 * math.pi / math.sqrt(GM_SUN)
        pos = from_keplerian(circular_orbit(), J2000_JD + period / 4.0)
        assert (pos.x, pos.y, pos.z) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)

    def test_inclined_orbit_leaves_ecliptic(self):
        period = 2.0 * math.pi / math.sqrt(GM_SUN)
        pos = from_keplerian(circular_orbit(inclination=30.0), J2000_JD + period / 4.0)
        assert pos.z == pytest.approx(0.5, abs=1e-9)
        assert math.hypot(pos.x, math.hypot(pos.y, pos.z)) == pytest.approx(1.0)

    def test_perihelion_distance_and_time_of_periapsis(self):
        elements = KeplerianElements(eccentricity=0.5, inclination=0.0,
                                     longitude_of_ascending_node=0.0, argument_of_periapsis=0.0,
                                     perihelion_distance=1.0, time_of_periapsis=J2000_JD)
        pos = from_keplerian(elements, J2000_JD)
        assert pos.orbital_plane.r == pytest.approx(1.0)
        assert pos.x == pytest.approx(1.0)

    def test_accepts_astro_time(self, j2000):
        assert from_keplerian(circular_orbit(), j2000).x == pytest.approx(1.0)

    def test_hyperbolic_distance_is_positive(self):
        elements = KeplerianElements(eccentricity=1.2, inclination=10.0,
                                     longitude_of_ascending_node=40.0, argument_of_periapsis=20.0,
                                     perihelion_distance=0.8, time_of_periapsis=J2000_JD)
        at_perihelion = from_keplerian(elements, J2000_JD)
        assert at_perihelion.orbital_plane.r == pytest.approx(0.8)
        later = from_keplerian(elements, J2000_JD + 200.0)
        assert later.orbital_plane.r > 0.8
        radius = math.sqrt(later.x ** 2 + later.y ** 2 + later.z ** 2)
        assert radius == pytest.approx(later.orbital_plane.r)

    def test_hyperbolic_orbit_centuries_after_perihelion(self):
        elements = KeplerianElements(eccentricity=1.2, inclination=0.0,
                                     longitude_of_ascending_node=0.0, argument_of_periapsis=0.0,
                                     perihelion_distance=0.25, time_of_periapsis=J2000_JD)
        radii = []
        for years in (10, 100, 300):
            pos = from_keplerian(elements, J2000_JD + years * 365.25)
            assert pos.solution.converged
            assert math.isfinite(pos.orbital_plane.r)
            radii.append(pos.orbital_plane.r)
        assert radii == sorted(radii)
        # outbound asymptote: roughly v_inf * t, well past a thousand AU
        assert radii[-1] > 1000.0

    def test_parabolic_orbit_is_nudged_onto_hyperbolic_branch(self):
        elements = KeplerianElements(eccentricity=1.0, inclination=0.0,
                                     longitude_of_ascending_node=0.0, argument_of_periapsis=0.0,
                                     perihelion_distance=1.0, time_of_periapsis=J2000_JD)
        pos = from_keplerian(elements, J2000_JD)
        assert pos.solution.converged
        assert pos.orbital_plane.r == pytest.approx(1.0, rel=1e-5)
        assert pos.x == pytest.approx(1.0, rel=1e-5)

    def test_non_convergence_warns(self, caplog):
        config = KeplerConfig(elliptic_tolerance=1e-12, max_iterations=1)
        with caplog.at_level(logging.WARNING, logger="astrosky"):
            pos = from_keplerian(circular_orbit(eccentricity=0.5, mean_anomaly=60.0),
                                 J2000_JD, config=config)
        assert not pos.solution.converged
        assert "did not converge" in caplog.text

    def test_non_convergence_raises_when_strict(self):
        config = KeplerConfig(elliptic_tolerance=1e-12, max_iterations=1)
        with pytest.raises(NonConvergentError) as info:
            from_keplerian(circular_orbit(eccentricity=0.5, mean_anomaly=60.0),
                           J2000_JD, config=config, strict=True)
        assert info.value.iterations == 1


class TestMinorBodyMagnitude:

    def test_at_opposition_reduces_to_distance_term(self):
        elements = circular_orbit(semi_major_axis=2.77, absolute_magnitude=3.33, slope=0.12)
        pos = from_keplerian(elements, J2000_JD)
        mag = minor_body_magnitude(elements, pos, (1.0, 0.0, 0.0))
        assert mag == pytest.approx(3.33 + 5.0 * math.log10(2.77 * 1.77))

    def test_fainter_away_from_opposition(self):
        elements = circular_orbit(semi_major_axis=2.77, absolute_magnitude=3.33, slope=0.12)
        pos = from_keplerian(elements, J2000_JD)
        at_opposition = minor_body_magnitude(elements, pos, (1.0, 0.0, 0.0))
        at_quadrature = minor_body_magnitude(elements, pos, (0.0, 1.0, 0.0))
        assert at_quadrature > at_opposition

    def test_without_absolute_magnitude(self):
        pos = from_keplerian(circular_orbit(), J2000_JD)
        assert minor_body_magnitude(circular_orbit(), pos, (0.5, 0.0, 0.0)) is None


class TestElementValidation:

    def test_negative_eccentricity(self):
        with pytest.raises(ValueError):
            circular_orbit(eccentricity=-0.1)

    def test_needs_size(self):
        with pytest.raises(ValueError):
            circular_orbit(semi_major_axis=None)

    def test_needs_position_on_orbit(self):
        with pytest.raises(ValueError):
            circular_orbit(mean_anomaly=None)


def mpc_line(h="3.33", epoch="K24B1", m="188.70269", peri="73.27343", node="80.25221",
             inc="10.58780", e="0.0794013", a="2.7660512", name="(1) Ceres"):
    chars = [" "] * 202

    def put(col, text):
        chars[col:col + len(text)] = text

    put(0, "00001")
    put(8, f"{h:>5}")
    put(14, " 0.15")
    put(20, epoch)
    put(26, f"{m:>9}")
    put(37, f"{peri:>9}")
    put(48, f"{node:>9}")
    put(59, f"{inc:>8}")
    put(70, f"{e:>9}")
    put(92, f"{a:>10}")
    put(166, name)
    return "".join(chars)


class TestMpcParsing:

    def test_parse_line(self):
        elements = KeplerianElements.from_mpc_line(mpc_line())
        assert elements.name == "(1) Ceres"
        assert elements.epoch == 2460615.5
        assert elements.mean_anomaly == pytest.approx(188.70269)
        assert elements.argument_of_periapsis == pytest.approx(73.27343)
        assert elements.longitude_of_ascending_node == pytest.approx(80.25221)
        assert elements.inclination == pytest.approx(10.5878)
        assert elements.eccentricity == pytest.approx(0.0794013)
        assert elements.semi_major_axis == pytest.approx(2.7660512)
        assert elements.absolute_magnitude == pytest.approx(3.33)
        assert elements.slope == pytest.approx(0.15)

    @pytest.mark.parametrize("line", ["", "# comment " * 20, "too short", mpc_line(epoch="Z24B1")])
    def test_bad_lines_return_none(self, line):
        assert KeplerianElements.from_mpc_line(line) is None

    def test_ceres_distance_is_plausible(self):
        elements = KeplerianElements.from_mpc_line(mpc_line())
        pos = from_keplerian(elements, elements.epoch)
        assert 2.5 < pos.orbital_plane.r < 3.0

    def test_load_file_filters_by_h(self, tmp_path, caplog):
        path = tmp_path / "MPCORB.DAT"
        path.write_text("\n".join([
            "MINOR PLANET CENTER ORBIT DATABASE (MPCORB)",
            "-" * 160,
            mpc_line(),
            mpc_line(h="17.20", name="faint"),
            mpc_line(h="5.10", name="(4) Vesta", a="2.3615"),
        ]) + "\n")
        with caplog.at_level(logging.INFO, logger="astrosky"):
            bodies = load_mpc_file(path, max_h=16.0)
        assert [b.name for b in bodies] == ["(1) Ceres", "(4) Vesta"]
        assert "Loaded 2 minor bodies" in caplog.text

    def test_load_file_respects_max_objects(self, tmp_path):
        path = tmp_path / "MPCORB.DAT"
        path.write_text("\n".join(mpc_line(name=f"body {i}") for i in range(5)) + "\n")
        assert len(load_mpc_file(path, max_objects=3)) == 3

# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for launch site feasibility and alternative ranking.

Direct ascent reaches any inclination >= |latitude| (0.1° tolerance).
"""
import dataclasses
import math

import numpy as np
import pytest

from spacia.domain.launch_sites import (
    DEFAULT_AZIMUTH_RANGE,
    LAUNCH_SITES,
    LaunchSite,
    analyze_launch_site,
    find_catalog_site,
    get_launch_site,
    rank_alternatives,
)
from spacia.domain.orbital_mechanics import (
    perigee_altitude_km,
    plane_change_delta_v_m_s,
)


class TestCatalog:
    """Launch site catalog is fixed, immutable reference data."""

    def test_nine_sites(self):
        assert len(LAUNCH_SITES) == 9
        assert isinstance(LAUNCH_SITES, tuple)

    def test_frozen_site(self):
        site = LAUNCH_SITES[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            site.lat = 0.0

    def test_get_launch_site_by_name(self):
        site = get_launch_site("Kourou (Guiana)")
        assert site.lat == 5.236
        assert site.azimuth_range == (5, 100)

    def test_get_unknown_site_raises(self):
        with pytest.raises(ValueError, match="Unknown launch site"):
            get_launch_site("Area 51")

    def test_find_requires_both_coordinates_within_tolerance(self):
        assert find_catalog_site(28.9, -80.9).name == "Cape Canaveral SFS"
        assert find_catalog_site(28.572, -81.2) is None
        assert find_catalog_site(29.1, -80.649) is None


class TestFeasibility:

    def test_cape_reaches_inclination_just_below_latitude(self):
        result = analyze_launch_site(28.5, 28.573, -80.649)
        assert result.feasible is True
        assert result.user_site == "Cape Canaveral SFS"
        assert result.min_inclination_required == pytest.approx(28.573)
        assert result.azimuth_range == (35, 120)

    def test_cape_cannot_reach_20_deg(self):
        result = analyze_launch_site(20, 28.573, -80.649)
        assert result.feasible is False

    def test_tolerance_boundary(self):
        assert analyze_launch_site(28.474, 28.573, -80.649).feasible is True
        assert analyze_launch_site(28.0, 28.573, -80.649).feasible is False

    def test_southern_latitude_uses_absolute_value(self):
        assert analyze_launch_site(39.3, -39.262, 177.864).feasible is True
        assert analyze_launch_site(30.0, -39.262, 177.864).feasible is False

    def test_polar_site_needs_near_polar_orbit(self):
        assert analyze_launch_site(89.0, 90.0, 0.0).feasible is False
        assert analyze_launch_site(90.0, -90.0, 0.0).feasible is True

    def test_equatorial_site_reaches_everything(self):
        for incl in (0.0, 10.0, 97.5, 180.0):
            assert analyze_launch_site(incl, 0.0, 0.0).feasible is True

    def test_feasible_iff_inclination_clears_latitude(self):
        for lat in np.linspace(-90, 90, 37):
            for incl in np.linspace(0, 180, 73):
                result = analyze_launch_site(float(incl), float(lat), 0.0)
                assert result.feasible == (incl >= abs(lat) - 0.1)


class TestSiteLabel:

    def test_custom_site_label_and_default_azimuth(self):
        result = analyze_launch_site(45.0, 10.0, 10.0)
        assert result.user_site == "Custom Site (10.000°, 10.000°)"
        assert result.azimuth_range == DEFAULT_AZIMUTH_RANGE

    def test_custom_site_negative_coordinates(self):
        result = analyze_launch_site(60.0, -12.3456, -45.5)
        assert result.user_site == "Custom Site (-12.346°, -45.500°)"

    def test_echoes_inputs(self):
        result = analyze_launch_site(53.0, 34.7, -120.6)
        assert result.user_site == "Vandenberg SFB"
        assert result.user_site_lat == 34.7
        assert result.user_site_lon == -120.6
        assert result.requested_inclination == 53.0


class TestAlternativeRanking:

    def test_best_alternative_for_20_deg_is_sriharikota(self):
        best = analyze_launch_site(20, 28.573, -80.649).best_alternative
        assert best.name == "Satish Dhawan Centre"
        assert best.feasible is True
        assert best.min_incl == pytest.approx(13.719)

    def test_no_feasible_site_falls_back_to_closest(self):
        best = analyze_launch_site(0.0, 28.573, -80.649).best_alternative
        assert best.name == "Kourou (Guiana)"
        assert best.feasible is False

    def test_ranking_puts_feasible_sites_first(self):
        ranked = rank_alternatives(30.0)
        flags = [alt.feasible for alt in ranked]
        assert flags == sorted(flags, reverse=True)
        feasible = [alt for alt in ranked if alt.feasible]
        diffs = [alt.incl_diff for alt in feasible]
        assert diffs == sorted(diffs)

    def test_best_alternative_feasible_whenever_any_site_is(self):
        for incl in np.linspace(0, 180, 181):
            incl = float(incl)
            best = analyze_launch_site(incl, 0.0, 0.0).best_alternative
            feasible_diffs = [
                abs(incl - abs(s.lat)) for s in LAUNCH_SITES if incl >= abs(s.lat) - 0.1
            ]
            if feasible_diffs:
                assert best.feasible is True
                assert best.incl_diff == pytest.approx(min(feasible_diffs))
            else:
                assert best.feasible is False

    def test_custom_catalog(self):
        catalog = (
            LaunchSite("North", 60.0, 0.0, (0, 90)),
            LaunchSite("South", -10.0, 0.0, (90, 180)),
        )
        result = analyze_launch_site(20.0, 60.0, 0.0, sites=catalog)
        assert result.user_site == "North"
        assert result.feasible is False
        assert result.best_alternative.name == "South"


class TestOrbitalHelpers:

    def test_plane_change_delta_v(self):
        expected = 2 * 7.8 * math.sin(math.radians(8.573) / 2) * 1000
        assert plane_change_delta_v_m_s(8.573) == pytest.approx(expected)
        assert plane_change_delta_v_m_s(-8.573) == pytest.approx(expected)

    def test_plane_change_60_deg_is_orbital_velocity(self):
        assert plane_change_delta_v_m_s(60.0) == pytest.approx(7800.0)

    def test_zero_plane_change(self):
        assert plane_change_delta_v_m_s(0.0) == 0.0

    def test_perigee_altitude(self):
        assert perigee_altitude_km(550.0, 0.0) == pytest.approx(550.0)
        assert perigee_altitude_km(550.0, 0.1) == pytest.approx(-142.1)

"""
Tests for sharing operations and catalogs between threads.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from common.types import GeographicCoordinate
from operations import factory, transformation_catalog
from reference import catalogs, ellipsoids
from reference.catalog import Catalog
from reference.base import IdentifiedObject
from validation import AccuracyChecker, RoundTripConfig

WORKERS = 8


def _grid():
    return [
        GeographicCoordinate.from_degrees(50.0 + 0.5 * i, -5.0 + 0.7 * j)
        for i in range(10) for j in range(10)
    ]


class TestSharedOperations:
    """A single operation instance serves concurrent callers."""

    @pytest.mark.parametrize("build", [
        factory.british_national_grid,
        factory.hungarian_eov,
        factory.rd_new,
        factory.krovak_sjtsk,
        factory.europe_equal_area,
    ], ids=lambda build: build.__name__)
    def test_first_use_from_many_threads(self, build):
        points = AccuracyChecker(RoundTripConfig(samples=100)).sample(build())
        expected = [build().forward(point) for point in points]

        # constants are derived lazily on the first forward of this instance
        shared = build()
        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = list(pool.map(shared.forward, points))

        assert [(r.x, r.y) for r in results] == [(e.x, e.y) for e in expected]

    def test_round_trips_from_many_threads(self):
        projection = factory.british_national_grid()
        points = _grid()

        def round_trip(point):
            return projection.reverse(projection.forward(point)).to_degrees()

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = list(pool.map(round_trip, points))

        for point, result in zip(points, results):
            assert result == pytest.approx(point.to_degrees(), abs=1e-9)

    def test_transformation_from_many_threads(self):
        transformation = transformation_catalog.OSGB36_TO_WGS84_6
        points = _grid()
        expected = [transformation.forward(point).to_degrees() for point in points]
        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = list(pool.map(lambda point: transformation.forward(point).to_degrees(), points))
        assert results == expected


class TestSharedCatalogs:
    """Catalogs are populated once even under concurrent first access."""

    def test_concurrent_population(self):
        calls = []

        def builder():
            calls.append(1)
            return [IdentifiedObject("TEST::2", "Second"), IdentifiedObject("TEST::1", "First")]

        catalog = Catalog("test", builder)
        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            snapshots = list(pool.map(lambda _: catalog.all, range(50)))

        assert len(calls) == 1
        assert all(snapshot is snapshots[0] for snapshot in snapshots)
        assert [entry.name for entry in snapshots[0]] == ["First", "Second"]

    def test_concurrent_lookups(self):
        def lookup(_):
            return (
                ellipsoids.ELLIPSOIDS["EPSG::7030"],
                catalogs.GEOGRAPHIC_CRS.from_name("WGS 84")[0],
                factory.PROJECTED_CRS["EPSG::27700"],
            )

        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            results = list(pool.map(lookup, range(50)))

        assert all(result == results[0] for result in results)
        assert results[0][0] is ellipsoids.WGS_1984

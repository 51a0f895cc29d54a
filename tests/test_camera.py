import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3

LOOK_FROM = Vector3(0.0, 0.0, 0.0)
LOOK_AT = Vector3(0.0, 0.0, -1.0)
VUP = Vector3(0.0, 1.0, 0.0)


def test_basis_is_orthonormal():
    camera = Camera(Vector3(3.0, 2.0, 1.0), Vector3(0.0, 0.0, 0.0), VUP, 40.0, 1.5)
    for a, b in ((camera.u, camera.v), (camera.v, camera.w), (camera.u, camera.w)):
        assert a.dot(b) == pytest.approx(0.0, abs=1e-12)
    for axis in (camera.u, camera.v, camera.w):
        assert axis.length() == pytest.approx(1.0)


def test_pinhole_viewport_corners(pinhole_camera, scripted_random):
    rng = scripted_random()  # a pinhole must not draw random numbers
    centre = pinhole_camera.get_ray(0.5, 0.5, rng)
    assert tuple(centre.origin) == (0.0, 0.0, 0.0)
    assert tuple(centre.direction) == pytest.approx((0.0, 0.0, -1.0))

    # vfov 90 and aspect 2 make a 4 x 2 viewport one unit ahead.
    lower_left = pinhole_camera.get_ray(0.0, 0.0, rng)
    assert tuple(lower_left.direction) == pytest.approx((-2.0, -1.0, -1.0))
    upper_right = pinhole_camera.get_ray(1.0, 1.0, rng)
    assert tuple(upper_right.direction) == pytest.approx((2.0, 1.0, -1.0))


def test_get_ray_requires_a_generator(pinhole_camera):
    with pytest.raises(TypeError):
        pinhole_camera.get_ray(0.25, 0.75)


def test_focus_distance_defaults_to_target_distance():
    camera = Camera(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 0.0), VUP, 60.0, 1.0)
    assert camera.focus_dist == pytest.approx(5.0)


def test_thin_lens_rays_converge_on_focus_plane(rng):
    camera = Camera(LOOK_FROM, Vector3(0.0, 0.0, -3.0), VUP, 60.0, 1.0, aperture=0.5)
    origins = set()
    for _ in range(50):
        ray = camera.get_ray(0.5, 0.5, rng)
        # Origins spread over the lens disk around look_from.
        assert (ray.origin - LOOK_FROM).length() <= camera.lens_radius
        assert ray.origin.z == pytest.approx(0.0)
        # The focus point for the image centre is the look_at point.
        assert tuple(ray.at(1.0)) == pytest.approx((0.0, 0.0, -3.0))
        origins.add(tuple(ray.origin))
    assert len(origins) > 1


def test_explicit_focus_distance_scales_viewport(scripted_random):
    near = Camera(LOOK_FROM, LOOK_AT, VUP, 90.0, 1.0, focus_dist=1.0)
    far = Camera(LOOK_FROM, LOOK_AT, VUP, 90.0, 1.0, focus_dist=10.0)
    assert far.horizontal.length() == pytest.approx(10.0 * near.horizontal.length())
    # Same angular field of view either way.
    a = near.get_ray(0.0, 0.0, scripted_random()).direction.unit_vector()
    b = far.get_ray(0.0, 0.0, scripted_random()).direction.unit_vector()
    assert tuple(a) == pytest.approx(tuple(b))


def test_rejects_non_positive_aspect_ratio():
    with pytest.raises(ValueError):
        Camera(LOOK_FROM, LOOK_AT, VUP, 90.0, 0.0)

"""A small CPU path tracer for spheres with diffuse, metal and glass materials.

The renderer traces jittered camera rays through a scene of spheres, bouncing
them off materials until they escape to a sky gradient or run out of depth,
and writes the averaged, gamma-corrected result as PPM or PNG.

Subpackages:
    core: Vectors, rays, sampling helpers, the radiance integrator and the render loop
    geometry: Sphere primitive and hit records
    materials: Lambertian, metal and dielectric scattering models
    scene: Scene container, scene manager and the default three-sphere scene
    camera: Pinhole camera with ray generation
    preview: Image export and preview utilities
"""

__version__ = "0.1.0"

# This file contains the viewer for the Poisson-disc sampler.
# It only reads the ordered points and the active points from the sampler
# and draws them; all sampling happens in sampler.py
import polyscope as ps
import polyscope.imgui as psim
import numpy as np
import argparse
from sampler_wrapper import Sampler_Wrapper

wrapper = None

#Global variables for UI
sampling = False
scene_file_path = None
seed_override = None

#callback to run one batch of sampler steps
def sampling_step():
    wrapper.step()

def to_3d(points_2d):
    # polyscope structures live in 3D, the sampler works in the z = 0 plane
    return np.column_stack([points_2d, np.zeros(points_2d.shape[0])])

def read_points():
    scene = wrapper.scene
    points = wrapper.get_points()

    ps.remove_point_cloud("points", error_if_absent=False)
    ps.remove_curve_network("path", error_if_absent=False)
    if points.shape[0] == 0:
        return

    if scene.draw_dots:
        cloud = ps.register_point_cloud("points", to_3d(points))
        cloud.set_radius(scene.dot_radius, relative=False)
        cloud.add_scalar_quantity("order", wrapper.get_order(), enabled=True, cmap=scene.colormap)

    if scene.draw_lines and points.shape[0] > 1:
        path = ps.register_curve_network("path", to_3d(points), wrapper.get_path_edges())
        path.set_color(scene.line_color)
        path.set_radius(scene.line_radius, relative=False)

def read_active():
    scene = wrapper.scene
    active = wrapper.get_active_points()

    ps.remove_point_cloud("active points", error_if_absent=False)
    if not scene.draw_active or active.shape[0] == 0:
        return

    cloud = ps.register_point_cloud("active points", to_3d(active))
    cloud.set_color(scene.active_color)
    cloud.set_radius(scene.dot_radius * 1.5, relative=False)

def refresh():
    read_points()
    read_active()

def sampling_init(scene_file=None, seed=None):
    global wrapper
    print("Initialized Sampler")
    if scene_file:
        print(f"Loading scene from: {scene_file}")
        wrapper = Sampler_Wrapper(scene_file=scene_file, seed=seed)
    else:
        wrapper = Sampler_Wrapper(seed=seed)
    refresh()

def ui_callback():
    global sampling
    changed_sampling, sampling = psim.Checkbox("Start Sampling", sampling)

    #button to run one batch of steps
    if psim.Button("Step"):
        sampling_step()
        refresh()

    if psim.Button("Run to Completion"):
        wrapper.run_to_completion()
        refresh()

    #reset button
    if psim.Button("Reset Sampler"):
        print("Resetting Sampler")
        sampling = False
        sampling_init(scene_file=scene_file_path, seed=seed_override)

    psim.TextUnformatted(f"points: {len(wrapper.get_points())}  active: {len(wrapper.get_active_points())}")

    if sampling:
        sampling_step()
        refresh()
        if wrapper.is_done():
            sampling = False

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Poisson-disc sampling viewer")
    parser.add_argument("--scene", help="Path to the scene file")
    parser.add_argument("--seed", help="Random seed, overrides the scene's seed", type=int)
    parser.add_argument("--num_steps", help="Number of frames to run without opening the viewer", type=int)
    args = parser.parse_args()

    # Store scene file globally for reset functionality
    scene_file_path = args.scene
    seed_override = args.seed

    if args.num_steps is not None:
        wrapper = Sampler_Wrapper(scene_file=args.scene, seed=args.seed)
        for k in range(args.num_steps):
            sampling_step()
            print(f"Step {k}: {len(wrapper.get_points())} points, {len(wrapper.get_active_points())} active")
            if wrapper.is_done():
                break
        print(f"Sampler finished in state: {wrapper.sampler.sampler_state.value}")
        exit()

    # initialize polyscope
    ps.init()
    ps.set_navigation_style("planar")
    ps.set_up_dir("neg_y_up")

    sampling_init(scene_file=args.scene, seed=args.seed)

    ps.set_user_callback(ui_callback)

    #turn off polyscope ground plane
    ps.set_ground_plane_mode("none")
    ps.show()

from orbital_cloud.flows.sampling_flow import sampling_pipeline

# Substrings identifying known temperature sensors
GPU_LABEL = 'amdgpu'
NVME_LABEL = 'nvme Composite'
CPU_TEMP_LABEL = 'Tctl'

# metric_type column
TYPE_USAGE = 'usage'
TYPE_TEMPERATURE = 'temperature'

# metric_name column
NAME_CPU_USAGE = 'cpu_usage'
NAME_MEMORY_USAGE = 'memory_usage'
NAME_GPU_TEMPERATURE = 'gpu_temperature'
NAME_NVME_TEMPERATURE = 'nvme_temperature'
NAME_CPU_TEMPERATURE = 'cpu_temperature'

# unit column
UNIT_PERCENT = 'percent'
UNIT_CELSIUS = 'celsius'

# First match wins
SENSOR_RULES = [
    (GPU_LABEL, NAME_GPU_TEMPERATURE),
    (NVME_LABEL, NAME_NVME_TEMPERATURE),
    (CPU_TEMP_LABEL, NAME_CPU_TEMPERATURE),
]

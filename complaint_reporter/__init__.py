# Community complaint reporter core

"""Short graphics and input demos."""
pytest_plugins = ['contention.plugin']

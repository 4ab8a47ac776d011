import os
import multiprocessing

# Requests are short CPU-bound aggregations over one fetched event list


def calculate_workers():
    """
    Worker count for the host: cpu_count + 1, between 2 and 6
    """
    cpu_count = multiprocessing.cpu_count()
    return max(2, min(6, cpu_count + 1))


workers = int(os.environ.get('WEB_CONCURRENCY', str(calculate_workers())))
worker_class = "sync"
max_requests = 1000
max_requests_jitter = 100
timeout = 60
keepalive = 5

# Binding
bind = os.environ.get('GUNICORN_BIND', "0.0.0.0:5000")

# Logging
loglevel = os.environ.get('LOG_LEVEL', 'info').lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(a)s" %(D)s'

# Process naming
proc_name = "penalty_tracker"

graceful_timeout = 30


def when_ready(server):
    """Called once when the master process is ready"""
    server.log.info("Penalty tracker ready to serve requests")


def pre_fork(server, worker):
    server.log.info("Worker spawned (pid: %s)", worker.pid)

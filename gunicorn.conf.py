# gunicorn.conf.py
from config import Config

accesslog = '-'
errorlog = '-'
loglevel = Config.LOG_LEVEL.lower()

bind = f"0.0.0.0:{Config.PORT}"

# Chapter lookups are small file reads
workers = 2
threads = 4
timeout = 30

proc_name = "bible_corpus"

SERVICE_NAME = "dbprobe"

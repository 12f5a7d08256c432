JOTTER_JOURNALS_VERSION = "0.1.0"

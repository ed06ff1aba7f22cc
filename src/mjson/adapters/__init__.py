"""Adaptadores concretos: minificador, parser JSON, colorizador y ficheros."""

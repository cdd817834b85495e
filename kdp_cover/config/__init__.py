"""Reference data and print-vendor configuration"""

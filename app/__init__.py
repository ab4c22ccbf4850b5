"""
通讯录与来电识别后端
"""

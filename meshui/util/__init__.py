"""Packet queues, log rotation and system memory helpers."""
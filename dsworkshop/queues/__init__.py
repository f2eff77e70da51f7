"""Ring-buffer and linked queues and a two-queue service simulation."""
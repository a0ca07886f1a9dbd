"""O-DU runtime modelling DAPS handover: F1 intake over UDP, per-leg RLC queues and a TTI MAC scheduler."""

__version__ = "0.1.0"